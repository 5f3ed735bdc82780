"""V8 coverage input schema.

Mirrors the JSON the V8 profiler (and NODE_V8_COVERAGE) emits:

{
  "result": [
    {
      "scriptId": "42",
      "url": "file:///path/to/script.js",
      "functions": [
        {
          "functionName": "f",
          "isBlockCoverage": true,
          "ranges": [{"startOffset": 0, "endOffset": 23, "count": 1}, ...]
        }
      ]
    }
  ]
}

Field names are accepted in their camelCase wire form or as snake_case.
Unknown keys (timestamps, source-map caches) are ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


class V8Range(BaseModel):
    """An offset interval with its execution count."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, strict=True)

    start_offset: int = Field(alias="startOffset")
    end_offset: int = Field(alias="endOffset")
    count: int = Field(ge=0)


class V8Block(BaseModel):
    """Coverage for one function: its ranges, outermost first."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, strict=True)

    function_name: str | None = Field(default=None, alias="functionName")
    is_block_coverage: bool = Field(alias="isBlockCoverage")
    ranges: list[V8Range]


class V8ScriptCoverage(BaseModel):
    """All function blocks reported for one script."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, strict=True)

    script_id: str = Field(default="", alias="scriptId")
    url: str
    functions: list[V8Block] = Field(default_factory=list)


class V8ProcessCoverage(BaseModel):
    """Top-level document written per process to NODE_V8_COVERAGE."""

    result: list[V8ScriptCoverage] = Field(default_factory=list)
