"""Autogroup: rule-managed course groups.

An autogroup is an ordinary course group whose ``id_number`` carries the
``autogroup|<group set id>`` marker. This package keeps such groups and
their membership in line with the desired state produced upstream,
without disturbing members that were added by hand.
"""

__version__ = "0.1.0"
