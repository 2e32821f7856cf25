"""
Finance Lectures

Interactive calculators for the corporate finance lecture modules.
"""
