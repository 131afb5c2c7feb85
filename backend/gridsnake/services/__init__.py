"""
Runtime services around the engine: input queue, tick driver and session.
"""
