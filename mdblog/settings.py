from pathlib import Path
from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "posts"
    CONTENT_EXTENSION: str = ".md"

    # Build output
    OUTPUT_DIR: str = "out"
    TEMPLATES_DIR: str = ""

    # Rendering
    MARKDOWN_EXTENSIONS: List[str] = ["fenced_code", "tables"]
    # "trusted" embeds converted HTML as-is, "escaped" shows it as text
    HTML_POLICY: Literal["trusted", "escaped"] = "trusted"
    RECENT_POSTS_LIMIT: int = 3
    DATE_FORMATS: List[str] = [
        "%Y-%m-%d",
        "%m-%d-%Y",
        "%m/%d/%Y",
        "%B %d, %Y",
        "%b %d, %Y",
        "%d %B %Y",
    ]

    # Front matter fallbacks
    DEFAULT_TITLE: str = "Untitled"
    DEFAULT_DATE: str = "No date"
    DEFAULT_EXCERPT: str = "No excerpt available."

    # Site
    SITE_TITLE: str = "My Blog"
    SITE_DESCRIPTION: str = "A blog documenting a journey through cloud engineering."
    SITE_INTRO: str = (
        "On this blog I share and document my journey, my thoughts "
        "and the technologies I am using."
    )
    SITE_AUTHOR: str = ""
    GITHUB_URL: str = ""
    LINKEDIN_URL: str = ""

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)

    @property
    def output_path(self) -> Path:
        return Path(self.OUTPUT_DIR)

    @property
    def templates_path(self) -> Path:
        return Path(self.TEMPLATES_DIR) if self.TEMPLATES_DIR else PACKAGE_TEMPLATES_DIR


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
