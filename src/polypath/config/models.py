import os
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 1

    @field_validator("sample_every")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("sample_every must be >= 1")
        return v


# ----------------- METRICS ---------------------


class MetricEuclideanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["euclidean"] = "euclidean"


class MetricManhattanModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["manhattan"] = "manhattan"


MetricUnion = Annotated[
    MetricEuclideanModel | MetricManhattanModel,
    Field(discriminator="kind"),
]

# ----------------- GRAPH SOURCES ---------------------


class GraphFileModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["path"] = "path"
    file: str
    dialect: Literal["auto", "tabular", "labeled"] = "auto"

    @field_validator("file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return os.path.expandvars(os.path.expanduser(v))


class GraphSampleModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["sample"] = "sample"


class GraphSyntheticModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    by: Literal["synthetic"] = "synthetic"
    n_points: int = 50
    radius: float = 200.0
    seed: int = 123
    width: float = 1000.0
    height: float = 1000.0

    @field_validator("n_points")
    @classmethod
    def _at_least_one(cls, v: int) -> int:
        if v < 1:
            raise ValueError("n_points must be >= 1")
        return v

    @field_validator("radius", "width", "height")
    def _positive(cls, v: float, info: ValidationInfo) -> float:
        if v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v


GraphSourceUnion = Annotated[
    GraphFileModel | GraphSampleModel | GraphSyntheticModel,
    Field(discriminator="by"),
]


# ------------------------------------------------------------------


class QueryModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    start: int
    end: int


class AppModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    run_id: str = "local"
    log: LogModel = LogModel()
    metric: MetricUnion = Field(default_factory=MetricEuclideanModel)
    graph: GraphSourceUnion = Field(default_factory=GraphSampleModel)
    query: QueryModel | None = None

    @model_validator(mode="after")
    def _check_query_ids(self):
        # only synthetic ids are known before loading
        if self.query is None or not isinstance(self.graph, GraphSyntheticModel):
            return self
        n = self.graph.n_points
        for role, pid in (("start", self.query.start), ("end", self.query.end)):
            if not 0 <= pid < n:
                raise ValueError(f"query.{role} must be in [0, {n}), got {pid}")
        return self


def load_config(path: str | os.PathLike) -> AppModel:
    with open(path, encoding="utf-8") as fp:
        return AppModel.model_validate_json(fp.read())
