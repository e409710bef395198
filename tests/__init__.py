"""Test suite for ddd_kernel.

- unit/: Unit tests, one module per kernel component
- utils/: Sample domain model shared by the tests
"""
