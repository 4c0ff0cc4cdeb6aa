"""
Process plumbing for the dashboard API: settings, logging, error types, the
Postgres pool and the seed feed client. Record filtering and aggregation live
in `transactions/`.
"""
