from typing import List

from pydantic import BaseModel, Field


class PostSummary(BaseModel):
    slug: str
    title: str
    date: str
    excerpt: str
    author: str = ""
    tags: List[str] = Field(default_factory=list)


class PostDetail(PostSummary):
    content: str


class LoadFailure(BaseModel):
    slug: str
    error: str


class PostCollection(BaseModel):
    posts: List[PostDetail] = Field(default_factory=list)
    failures: List[LoadFailure] = Field(default_factory=list)


class StaticParams(BaseModel):
    slug: str


class BuildReport(BaseModel):
    output_dir: str
    pages: List[str] = Field(default_factory=list)
    failures: List[LoadFailure] = Field(default_factory=list)
