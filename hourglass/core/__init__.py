"""
Core Infrastructure for Hourglass.

Architecture Position
---------------------
    CLI (outermost)
      └── Commands (config command tree)
            └── **Core** (innermost - you are here)

The Core layer has no dependencies on other Hourglass modules.

Components
----------
**Configuration (config/)**
    Pydantic settings models, typed ConfigValue handles and YAML persistence.

**Logging (logging.py)**
    Structured logging with context binding.

**Exceptions (exceptions.py)**
    The HourglassError hierarchy.
"""
