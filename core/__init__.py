"""
Core package for Cafezinho Orders
Contains the checkout orchestration, exceptions and shared helpers
"""
