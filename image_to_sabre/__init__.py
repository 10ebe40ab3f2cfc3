"""
Image-to-Sabre: flight booking screenshots to Sabre GDS air segment lines.
"""
