import sys

from openai_mcp.server.main import main

sys.exit(main())
