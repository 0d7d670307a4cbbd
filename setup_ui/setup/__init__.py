"""
Pages of the setup wizard.
"""
