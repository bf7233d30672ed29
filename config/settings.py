from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, Literal
from pathlib import Path

from graph.naming import check_node_name


class Settings(BaseSettings):
    """Application configuration with validation."""

    # Graph defaults
    graph_name: str = Field(default="G")
    graph_kind: Literal["digraph", "graph"] = Field(default="digraph")
    indent: int = Field(default=4, ge=0, le=16)

    # Storage Paths
    output_dir: Path = Field(default=Path("./output"))

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_file: Optional[Path] = Field(default=Path("dotgraph.log"))

    model_config = SettingsConfigDict(
        env_prefix="DOTGRAPH_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    @field_validator("graph_name")
    @classmethod
    def check_graph_name(cls, v):
        result = check_node_name(v)
        if not result.accepted:
            raise ValueError(result.reason)
        return v

    def validate_paths(self, output: bool = True) -> None:
        if output:
            self.output_dir.mkdir(parents=True, exist_ok=True)

        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
