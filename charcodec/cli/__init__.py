"""
Command line tools for charcodec
"""
