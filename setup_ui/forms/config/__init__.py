"""
Configuration sub-forms reused by the setup wizard and the settings pages.
"""
