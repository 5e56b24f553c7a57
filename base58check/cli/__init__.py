"""
Base58Check - Command Line Interface
"""
