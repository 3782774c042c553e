from .job import Container, Job, Jobs

__all__ = ["Container", "Job", "Jobs"]
