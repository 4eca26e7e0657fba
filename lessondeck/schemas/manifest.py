"""
Deck manifest schemas for lessondeck.

A manifest is a YAML file that replaces name-based ordering with an explicit
list:

    title: Swift Programming Book
    lessons:
      - file: basics.swift
        title: The Basics
      - file: operators.swift
        name: 2.Operator
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional


class ManifestEntry(BaseModel):
    file: str                     # path relative to the manifest
    name: Optional[str] = None    # defaults to the file stem
    title: Optional[str] = None
    order: Optional[int] = Field(default=None, ge=0)

    @field_validator('file')
    @classmethod
    def file_not_blank(cls, v):
        if not v.strip():
            raise ValueError('Manifest entry file must not be blank')
        return v


class DeckManifest(BaseModel):
    title: Optional[str] = None
    lessons: list[ManifestEntry] = Field(..., min_length=1)
