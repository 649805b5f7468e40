"""
Service layer.

Each service encapsulates the business logic for one domain and talks
to the database only through the ``Storage`` handle it is given, so
API handlers never issue SQL themselves.
"""
