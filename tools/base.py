"""
Tool base class and common types.

Tools are the deterministic entry points an assistant or script calls by
name. Each one declares its parameters, validates them, and wraps the
result of a core calculation in a ToolResult.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from core.scale_calc.errors import ScaleCalcError


@dataclass(frozen=True)
class ToolParameter:
    """
    Tool parameter specification.

    Attributes:
        name: Parameter name
        type: Python type (str, bool, ...)
        description: Human-readable description of the parameter
        required: Whether parameter is required
        default: Default value if not required
        choices: Allowed values, or None for any value of the right type
    """

    name: str
    type: type
    description: str
    required: bool = True
    default: Any = None
    choices: tuple[Any, ...] | None = None

    def validate(self, value: Any) -> tuple[bool, str | None]:
        """
        Validate parameter value.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if value is None:
            if self.required:
                return False, f"Required parameter '{self.name}' is missing"
            return True, None

        if not isinstance(value, self.type):
            return (
                False,
                f"Parameter '{self.name}' must be {self.type.__name__}, got {type(value).__name__}",
            )

        if self.choices is not None and value not in self.choices:
            return False, f"Parameter '{self.name}' must be one of {list(self.choices)}, got {value!r}"

        return True, None


@dataclass(frozen=True)
class ToolResult:
    """
    Result from tool execution.

    Attributes:
        success: Whether execution succeeded
        data: Result data (dict, list, str, etc.)
        error: Error message if success=False
        metadata: Optional metadata (input echo, sizes, etc.)
    """

    success: bool
    data: Any = None
    error: str | None = None
    metadata: dict[str, Any] | None = None


class MusicalTool(ABC):
    """
    Abstract base class for music theory tools.

    Subclasses must implement:
        - name: Unique tool identifier
        - description: What the tool computes and when to use it
        - parameters: List of ToolParameter specs
        - execute(): Core tool logic

    Example:
        class CalculateScale(MusicalTool):
            @property
            def name(self) -> str:
                return "calculate_scale"

            def execute(self, **kwargs) -> ToolResult:
                return ToolResult(success=True, data={...})
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique tool identifier (lowercase, underscores)."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description used when listing tools."""

    @property
    @abstractmethod
    def parameters(self) -> list[ToolParameter]:
        """
        List of parameters this tool accepts.

        Order matters — positional parameters come first.
        """

    def validate_inputs(self, **kwargs) -> tuple[bool, str | None]:
        """
        Validate all input parameters.

        Returns:
            Tuple of (is_valid, error_message)
        """
        for param in self.parameters:
            is_valid, error = param.validate(kwargs.get(param.name))
            if not is_valid:
                return False, error

        return True, None

    @abstractmethod
    def execute(self, **kwargs) -> ToolResult:
        """
        Execute tool with validated parameters.

        Returns:
            ToolResult with success status and data
        """

    def __call__(self, **kwargs) -> ToolResult:
        """
        Execute tool with automatic validation.

        Parameter errors and calculation errors (ScaleCalcError) come back as
        a failed ToolResult; anything else propagates.
        """
        is_valid, error = self.validate_inputs(**kwargs)
        if not is_valid:
            return ToolResult(success=False, error=error)

        try:
            return self.execute(**kwargs)
        except ScaleCalcError as e:
            return ToolResult(success=False, error=f"Tool execution failed: {e}")

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize tool for listing.

        Returns dict with name, description, parameters.
        """
        return {
            "name": self.name,
            "description": self.description,
            "parameters": [
                {
                    "name": p.name,
                    "type": p.type.__name__,
                    "description": p.description,
                    "required": p.required,
                    "default": p.default,
                    "choices": list(p.choices) if p.choices is not None else None,
                }
                for p in self.parameters
            ],
        }
