"""
product-check: validate, expand, suppress and detect product codes.
"""
