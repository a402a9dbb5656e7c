from leadmagic_mcp.main import run

run()
