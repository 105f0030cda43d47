"""
Gatehouse API application.
"""
