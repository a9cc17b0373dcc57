"""
Project template library.

Each template pre-selects a requirement preset and carries boilerplate text
that is appended to the generated prompt when the template is chosen.
"""
