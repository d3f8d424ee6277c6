"""
Core device configuration services.
"""
