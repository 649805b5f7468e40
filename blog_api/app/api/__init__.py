"""
API package.

``router.build_router`` assembles the endpoint routers for the
configured account mode; ``main.create_app`` mounts the result under
``/api``.
"""
