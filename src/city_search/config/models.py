import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    debug: bool = False


class DataModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    path: str = "data.txt"
    encoding: str = "utf-8"

    @field_validator("path")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


class ShellModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    exit_sentinel: str = "0"
    # None => ask for the norm on every query
    default_norm: Literal[0, 1, 2] | None = None


class AppModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "city-search"
    run_id: str = "local"
    data: DataModel = Field(default_factory=DataModel)
    log: LogModel = LogModel()
    shell: ShellModel = Field(default_factory=ShellModel)
