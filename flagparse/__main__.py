#!/usr/bin/env python3
"""
Show how flagparse reads an argv:

    python -m flagparse --key value [item] ...

"""
# Imports:
from __future__ import annotations

import logging as logmod

##-- logging
logging         = logmod.root
logging.setLevel(logmod.WARNING)
##-- end logging

def main(argv:list[str]|None=None) -> None:
    from flagparse.parser import ArgumentParser
    parser = ArgumentParser(argv)
    if parser.get_switch_argument("debug"):
        logmod.basicConfig(level=logmod.DEBUG)

    print(f"Tokens : {list(parser.tokens)}")
    print(f"Items  : {list(parser.items)}")

if __name__ == "__main__":
    main()
