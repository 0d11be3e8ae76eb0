"""StudyGate API adapter package.

Architectural role:
- Defines the external interaction boundary for HTTP and CLI interfaces.
- Performs transport-level parsing and response shaping.
- Delegates the provider call to the core layer.
"""
