#!/usr/bin/env python3
"""
Wrapper para ejecutar el servidor MCP de contenido en modo stdio
"""

import asyncio
from wp_content.server import main

if __name__ == "__main__":
    asyncio.run(main())
