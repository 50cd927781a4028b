from pydantic import BaseModel, Field


class PreferenceProfile(BaseModel):
    """
    Taste signals inferred from a sample of a member's history.
    """

    top_directors: list[str] = Field(default_factory=list)
    # Catalog ids the sampled history titles resolved to
    watched_ids: list[int] = Field(default_factory=list)

    def likes_director(self, name: str | None) -> bool:
        return bool(name) and name in self.top_directors
