"""projgen -- interactive starter-project generator.

Asks for a framework and a project name, then either delegates to an ``npx``
scaffolding tool or writes a small Express / static-site project itself.
"""

__version__ = "1.0.0"
