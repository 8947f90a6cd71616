"""Request, session and channel handlers.

limits.py / keyed_limits.py:
    Sliding-window rate limiters (per connection and per client address).

registry.py:
    Session registry with semaphore-based capacity admission.

platform.py:
    Process-wide platform metrics with snapshot()/advance().

consultation.py / algorithm.py:
    HTTP request handlers: admission, validation, production.

dispatcher.py:
    Best-effort push delivery of asynchronous analysis results.

services.py:
    Wires the above into one Services object per app.

websocket/:
    Channel lifecycle, parsing, error notices and the message loop.
"""
