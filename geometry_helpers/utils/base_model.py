# utils/base_model.py
from typing import TypeVar, Any, cast
from pydantic import BaseModel

T = TypeVar('T', bound=BaseModel)


class ImmutableModel(BaseModel):
    """
    Base class for all geometric values providing immutability and copy functionality.

    Every shape in this package inherits from this class:
    - Immutability: instances are frozen after creation, so they can be shared freely
    - Hashability: frozen models hash on their field values
    - Copyability: modified copies are created via with_changes() and re-validated
    """
    model_config = {
        "frozen": True,
    }

    def with_changes(self, **changes: Any) -> T:
        """
        Create a new instance with specified changes.

        The copy goes through validation again, so normalizing validators
        (e.g. the canonical point of a Line) are applied to the new values.

        Args:
            **changes: Keyword arguments with field values to change

        Returns:
            New instance with updated values

        Raises:
            ValueError: If an invalid field name is provided
        """
        current_data = dict(self)

        for key, value in changes.items():
            if key not in current_data:
                raise ValueError(f"Invalid field: {key}")
            current_data[key] = value

        cls = self.__class__
        return cast(T, cls.model_validate(current_data))
