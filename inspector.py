"""Startup inspector: lists the components registered on the app."""

import sys

HEADER = "Let's inspect the beans provided by Spring Boot:"


def component_names(app):
    """Endpoint and extension names registered on a Flask app, sorted."""
    return sorted(set(app.view_functions) | set(app.extensions))


def inspect_components(names, stream=None):
    """Print the header, then each name in ascending order, one per line.

    ``names`` may be empty or None; the header is printed either way.
    """
    out = stream if stream is not None else sys.stdout
    print(HEADER, file=out)
    for name in sorted(names or ()):
        print(name, file=out)
