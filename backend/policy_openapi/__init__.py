"""Policy OpenAPI — serves the policy-engine OpenAPI document customized per deployment.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
