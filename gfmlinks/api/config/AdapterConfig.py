"""Link adapter feature configuration."""

from pydantic import BaseModel, ConfigDict, Field


class AdapterConfig(BaseModel):
    """Which host operations the link adapter intercepts."""

    model_config = ConfigDict(extra="forbid")

    translate_on_open: bool = Field(True, description="Translate slug fragments before opening a link")
    augment_metadata: bool = Field(True, description="Inject synthetic headings/links into cached metadata")
    rewrite_on_edit: bool = Field(True, description="Rewrite typed heading text into its slug while editing")
