"""Route blueprints package for API endpoints.

One Flask blueprint per route group: the public health/debug routes and
the four token-protected mock audit routes (analyze, copywriter, layout,
summarize). Each module documents its endpoint and JSON contract.
"""
