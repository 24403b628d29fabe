"""Infrastructure layer — filesystem access for planner pages.

This layer depends only on the stdlib. It must never import from domain,
services, commands, or output; the service layer validates input before
anything reaches it.
"""
