"""Routing — ordered, immutable command route table.

Routes are declared during setup and compiled into a frozen table
before the first message is dispatched.
"""
