"""
Makes `python -m pillar` work the same as the `pillar` command.
"""
from pillar.cmdline import main

main()
