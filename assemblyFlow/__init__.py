"""AssemblyAI operations for workflow hosts."""

__version__ = "1.3.0"

TOOL_NAME = "assemblyflow"
USER_AGENT = f"{TOOL_NAME}/{__version__}"
