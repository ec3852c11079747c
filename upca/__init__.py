"""
UPC-A barcode codec.
"""
