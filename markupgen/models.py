"""Pydantic models for YAML markup documents."""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

Scalar = Union[str, int, float]


class RuleSpec(BaseModel):
    """A CSS rule; nested rules flatten into descendant selectors."""

    selector: str = Field(..., description="Selector or @media query.")
    declarations: Dict[str, Scalar] = Field(
        default_factory=dict,
        description="Property declarations; camelCase names are kebab-cased.",
    )
    rules: List["RuleSpec"] = Field(
        default_factory=list, description="Nested rules under the selector."
    )


class StyleSpec(BaseModel):
    """Named scoped style sheet."""

    name: str = Field(..., description="Name referenced by NodeSpec.style.")
    rules: List[RuleSpec] = Field(default_factory=list)


class NodeSpec(BaseModel):
    """DOM element with attributes and children."""

    tag: str = Field(..., description="Element name.")
    attrs: Dict[str, Optional[Scalar]] = Field(
        default_factory=dict,
        description="Attributes; null marks a value-less attribute.",
    )
    classes: List[str] = Field(
        default_factory=list, description="Class names appended to the class attribute."
    )
    style: Optional[str] = Field(
        None, description="Name of a scoped style applied to this subtree."
    )
    children: List[Union["NodeSpec", Scalar]] = Field(
        default_factory=list, description="Child elements or text."
    )


class DocumentSpec(BaseModel):
    """Top-level document: scoped styles plus head and body trees."""

    title: str = Field("", description="Page title.")
    lang: Optional[str] = Field(None, description="lang attribute for <html>.")
    styles: List[StyleSpec] = Field(default_factory=list)
    head: List[NodeSpec] = Field(default_factory=list)
    body: List[Union[NodeSpec, Scalar]] = Field(default_factory=list)


RuleSpec.model_rebuild()
NodeSpec.model_rebuild()
