"""
Pydantic schemas for check definitions.
"""
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

# Parameter slots in validation order. type, hint and the regex flag are not slots.
PARAMETER_SLOTS = ("path", "cmd", "user", "group", "name", "key", "value", "after")


class Cond(BaseModel):
    """One atomic test against host state.

    Empty strings mean "not supplied". The regex flag is derived from the
    type suffix by the dispatch engine and cannot be configured.
    """
    model_config = ConfigDict(extra="forbid")

    hint: str = ""
    type: str = ""

    path: str = ""
    cmd: str = ""
    user: str = ""
    group: str = ""
    name: str = ""
    key: str = ""
    value: str = ""
    after: str = ""

    _regex: bool = PrivateAttr(default=False)

    @property
    def regex(self) -> bool:
        return self._regex

    def with_regex(self, regex: bool) -> "Cond":
        """Copy of this condition carrying the given regex flag."""
        working = self.model_copy()
        working._regex = regex
        return working

    def with_path(self, path: str) -> "Cond":
        working = self.model_copy(update={"path": path})
        working._regex = self._regex
        return working

    def describe(self) -> str:
        """Populated fields, one per line, for debug traces."""
        output = ""
        for name in ("hint", "type") + PARAMETER_SLOTS:
            value = getattr(self, name)
            if value:
                output += f"\t{name}: {value}\n"
        return output


class Check(BaseModel):
    """Smallest unit that shows up on a scoring report."""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    message: str
    hint: str = ""
    points: int

    fail: list[Cond] = Field(default_factory=list)
    pass_: list[Cond] = Field(default_factory=list, alias="pass")
    pass_override: list[Cond] = Field(default_factory=list, alias="passoverride")
