"""
Test suite for the pdfblocks project.
"""
