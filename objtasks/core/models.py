"""Core data models for ObjTasks."""

from typing import Union

from pydantic import BaseModel, ConfigDict


class Rectangle(BaseModel):
    """A rectangle with width and height."""
    model_config = ConfigDict(extra="allow")

    width: Union[int, float]
    height: Union[int, float]

    def get_area(self) -> Union[int, float]:
        """Return width multiplied by height."""
        return self.width * self.height


def rectangle(width: Union[int, float], height: Union[int, float]) -> Rectangle:
    """Create a rectangle from positional dimensions.

    Args:
        width: Rectangle width.
        height: Rectangle height.

    Returns:
        Rectangle instance.

    Example:
        >>> r = rectangle(10, 20)
        >>> r.get_area()
        200
    """
    return Rectangle(width=width, height=height)
