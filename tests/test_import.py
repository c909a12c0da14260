"""Verify package imports work correctly."""


def test_import_rivit() -> None:
    """Test that rivit can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import rivit

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert rivit.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from rivit import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_names_resolve() -> None:
    """Every name in __all__ is importable from the package root."""
    import rivit

    for name in rivit.__all__:
        assert hasattr(rivit, name), name
