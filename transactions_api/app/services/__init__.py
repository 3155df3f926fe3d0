"""
Service layer abstraction.

Each service encapsulates the query logic for one concern: seeding the
store, listing transactions and building the monthly reports.  Services
receive the ``ProductStore`` explicitly so API handlers stay thin.
"""
