"""Pydantic model adapter.

Turns a domain object into a validated pydantic model (API schema,
persistence DTO) by validating its default plain projection.

Usage:
    class UserSchema(BaseModel):
        id: str
        name: str

    adapter = PydanticModelAdapter(UserSchema)
    schema = user.to_object(adapter)      # UserSchema(id='...', name='Ada')
    schemas = adapter.adapt_many(users)
"""

from typing import TypeVar

from pydantic import BaseModel

from ddd_kernel.domain.adapters.base_adapter import Adapter
from ddd_kernel.domain.serialization import ProjectableProtocol

ModelT = TypeVar("ModelT", bound=BaseModel)


class PydanticModelAdapter(Adapter[ProjectableProtocol, ModelT]):
    """Validate a domain object's projection into a pydantic model.

    Attributes:
        model: Target model class.
    """

    def __init__(self, model: type[ModelT]) -> None:
        """Initialize adapter.

        Args:
            model: Pydantic model class to validate into.
        """
        self.model = model

    def adapt_one(self, source: ProjectableProtocol) -> ModelT:
        """Validate the default projection of source.

        Raises:
            pydantic.ValidationError: If the projection does not fit the model.
        """
        return self.model.model_validate(source.to_object())
