"""
Use cases for the contentdeck services.

Each service validates request input and delegates to exactly one repository
call. Routers call these services instead of touching the stores directly.
"""
