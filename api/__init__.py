"""
Reputation API Package.

FastAPI surface for the reputation scorer: proof callback
intake, reputation lookup, score calculator and loan quotes.
"""
