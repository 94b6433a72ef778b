"""
Core domain models, contracts and logging setup.

This module contains the foundational building blocks that are independent
of the checkout platform runtime.
"""
