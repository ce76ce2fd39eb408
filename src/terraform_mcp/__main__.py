"""Allow ``python -m terraform_mcp``."""

from terraform_mcp.mcp_server import main

main()
