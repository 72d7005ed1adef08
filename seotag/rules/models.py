from pydantic import BaseModel, Field


class ProjectRules(BaseModel):
    slug: str = "seotag"
    rules_version: str = "1"


class MetadataRules(BaseModel):
    title_separator: str = " | "
    description_max_words: int = Field(default=100, ge=0)
    default_lang: str = "en_US"
    paginator_message: str = "Page %<current>s of %<total>s for "
    default_audio_type: str = "audio/mpeg"
    title_disable_flag: str = "title=false"


class DateRules(BaseModel):
    default_timezone: str = "UTC"


class Rules(BaseModel):
    project: ProjectRules = Field(default_factory=ProjectRules)
    metadata: MetadataRules = Field(default_factory=MetadataRules)
    dates: DateRules = Field(default_factory=DateRules)

    def get_metadata_rules(self) -> MetadataRules:
        return self.metadata

    def get_date_rules(self) -> DateRules:
        return self.dates


DEFAULT_RULES = Rules()
