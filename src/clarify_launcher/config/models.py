# src/clarify_launcher/config/models.py

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class NodeDescriptor(BaseModel):
    """One entry of ``clarify-nodes``."""

    model_config = ConfigDict(frozen=True, extra="ignore", str_strip_whitespace=True)

    hostname: str = Field(min_length=1)
    net_interface: str = Field(
        min_length=1,
        validation_alias=AliasChoices("netinterface", "netInterface", "net_interface"),
    )
    address: str = ""              # empty -> derive from DNS
    tools: str = Field(min_length=1, validation_alias=AliasChoices("tools", "toolsPath", "tools_path"))

    @field_validator("address", mode="before")
    @classmethod
    def _none_is_empty(cls, v):
        return "" if v is None else str(v).strip()


class ClarifySettings(BaseModel):
    """``clarify-common``: settings shared by every node."""

    model_config = ConfigDict(frozen=True, extra="ignore", str_strip_whitespace=True)

    install: str = Field(min_length=1)
    share: str = Field(min_length=1)
    user: str = Field(min_length=1)
    nomad_port: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("nomadport", "nomadPort", "nomad_port"),
    )

    @field_validator("nomad_port", mode="before")
    @classmethod
    def _blank_port_is_unset(cls, v):
        if v in (None, "", 0, "0"):
            return None
        return v


class Topology(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", str_strip_whitespace=True)

    nodes: List[NodeDescriptor] = Field(
        default_factory=list,
        validation_alias=AliasChoices("clarify-nodes", "nodes"),
    )
    clarify: ClarifySettings = Field(validation_alias=AliasChoices("clarify-common", "clarify"))

    def hostnames(self) -> List[str]:
        return [n.hostname for n in self.nodes]
