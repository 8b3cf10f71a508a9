from pydantic import BaseModel, Field
from typing import Literal


class VCSConfig(BaseModel):
    provider: Literal["github", "local"] = "github"
    token_env: str = "GITHUB_TOKEN"
    owner: str = "oxidecomputer"
    repo: str = "rfd"
    # Checkout root used by the "local" provider
    local_path: str = "."

    @property
    def repo_id(self) -> str:
        return f"{self.owner}/{self.repo}"


class RenderConfig(BaseModel):
    # None resolves to <system temp>/rfd-render
    workspace_root: str | None = None
    command: list[str] = Field(default_factory=lambda: ["asciidoctor-pdf"], min_length=1)
    requires: list[str] = Field(default_factory=list)
    attributes: dict[str, str] = Field(default_factory=dict)


class RfdProcessorConfig(BaseModel):
    vcs: VCSConfig = Field(default_factory=VCSConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
