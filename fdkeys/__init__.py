"""Candidate key discovery from functional dependencies."""

__all__ = [
    "AttributeSet",
    "Dependency",
    "DependencySet",
    "closure",
    "is_superkey",
    "minimize",
    "enumerate_all",
    "load_dependency_file",
]


def __getattr__(name):
    if name in {"AttributeSet", "Dependency", "DependencySet"}:
        from .elements import AttributeSet, Dependency, DependencySet

        return locals()[name]
    if name in {"closure", "is_superkey", "minimize", "enumerate_all"}:
        from .keys import closure, is_superkey, minimize, enumerate_all

        return locals()[name]
    if name == "load_dependency_file":
        from .parser import load_dependency_file

        return load_dependency_file
    raise AttributeError(name)
