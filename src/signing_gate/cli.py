"""
Command-line entry point.

Exposes the package task namespace as the `signing-gate` program, so tasks
run without a tasks.py in the project:

    signing-gate signing.check --policy=strict
"""

from invoke import Program

from . import namespace, __version__

program = Program(namespace=namespace, version=__version__, name='signing-gate',
                  binary='signing-gate')
