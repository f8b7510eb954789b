"""
duckduckGoose callable functions.

Backend for the duckduckGoose mobile app, exposed over the Firebase
callable protocol.
"""
