from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class UserProfile(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    age: int = 0
    weight: float = 0.0
    gender: Optional[Literal["male", "female", "other"]] = None
    activity_level: Optional[Literal["sedentary", "light", "moderate", "active", "very active"]] = Field(
        None, alias="activityLevel"
    )
    avatar_url: Optional[str] = Field(None, alias="avatarUrl")
    symptoms: list[str] = Field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return bool(self.age and self.weight and self.gender and self.activity_level)

    @property
    def formatted_activity_level(self) -> str:
        if not self.activity_level:
            return "Not specified"
        return " ".join(word[:1].upper() + word[1:] for word in self.activity_level.split(" "))
