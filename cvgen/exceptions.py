"""Base exception shared by all CVGEN contexts."""


class CvgenError(Exception):
    """
    Base class for errors that abort a generation run.

    Attributes:
        stage: Pipeline stage that failed ("read", "parse" or "write")
    """

    stage = "unknown"
