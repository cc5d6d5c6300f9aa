class BlogError(Exception):
    """Base class for content pipeline errors."""


class ContentDirectoryUnavailable(BlogError):
    def __init__(self, path, reason: str = ""):
        self.path = path
        message = f"Content directory unavailable: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class PostNotFoundError(BlogError):
    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Post not found: {slug}")


class MalformedFrontMatter(BlogError):
    def __init__(self, slug: str, reason: str = ""):
        self.slug = slug
        message = f"Malformed front matter in post {slug}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
