from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Entity(BaseModel):
    """Base entity class shared by the agenda domain models.

    Fields are declared in snake_case and exposed to external collaborators
    in camelCase (``model_dump(by_alias=True)``). Both spellings are accepted
    on construction.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
