"""Structured logging for the page server.

Request ids and access events are bound by the context middleware; this
package only owns the structlog/stdlib wiring.
"""
