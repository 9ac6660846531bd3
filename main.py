#!/usr/bin/env python3
from trackify.system.lookup_system import main

if __name__ == "__main__":
    main()
