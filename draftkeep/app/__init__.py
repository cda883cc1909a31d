"""Application layer - ports and session state without Qt dependencies.

This layer contains:
- Ports (Protocols for the storage medium and the host editor)
- Per-session state

Allowed imports:
- Standard library (typing, dataclasses, etc.)
- draftkeep.config

Forbidden imports:
- PyQt5/Qt imports
- ui/ and infra/ modules

Author: Michael Economou
Date: 2026-10-19
"""
