"""Domain models for func-cli."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

DEFAULT_RUNTIME = "node"
DEFAULT_TEMPLATE = "http"

# Seconds. Callers layering request deadlines over platform clients use this;
# the client factory does not enforce it.
DEFAULT_WAITING_TIMEOUT = 60

BUILTIN_RUNTIMES = ("go", "node", "python", "quarkus", "rust", "springboot", "typescript")


class ResourceFamily(str, Enum):
    """Value object naming a remote resource family."""

    SERVING = "serving"
    EVENTING = "eventing"


class CreateSettings(BaseModel):
    """Bound settings for the create command after flag/env/default merging."""

    runtime: str = Field(default=DEFAULT_RUNTIME, description="Function runtime")
    template: str = Field(default=DEFAULT_TEMPLATE, description="Function template")
    repositories: str = Field(default="", description="Extended template repositories path")
    confirm: bool = Field(default=False, description="Prompt to confirm options")
    verbose: bool = Field(default=False, description="Verbose output")

    model_config = {"frozen": True}


class CreationDescriptor(BaseModel):
    """Resolved, validated parameters describing a new function project."""

    name: str = Field(..., min_length=1, description="Function name, derived from the path")
    path: str = Field(..., description="Absolute path of the project root")
    runtime: str = Field(default=DEFAULT_RUNTIME, description="Runtime language/framework")
    template: str = Field(default=DEFAULT_TEMPLATE, description="Function signature template")
    repositories: str = Field(default="", description="Extended template repositories path")
    verbose: bool = Field(default=False, description="Verbose output")
    confirm: bool = Field(default=False, description="Interactive confirmation requested")

    model_config = {"frozen": True, "strict": True}

    def summary(self) -> list[tuple[str, str]]:
        """The four primary fields as (label, value) pairs, in display order."""
        return [
            ("Project path", self.path),
            ("Function name", self.name),
            ("Runtime", self.runtime),
            ("Template", self.template),
        ]


class Function(BaseModel):
    """A function project as handed to the materializer."""

    name: str = Field(..., description="Function name")
    root: str = Field(..., description="Absolute project root")
    runtime: str = Field(..., description="Runtime language/framework")
    template: str = Field(..., description="Template name")

    model_config = {"frozen": True, "strict": True}

    @classmethod
    def from_descriptor(cls, descriptor: CreationDescriptor) -> Function:
        return cls(
            name=descriptor.name,
            root=descriptor.path,
            runtime=descriptor.runtime,
            template=descriptor.template,
        )
