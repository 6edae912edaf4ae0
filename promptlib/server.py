from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

from .config import Settings, create_directories
from .repository import PromptRepository
from .tools.prompts import register_tools as register_prompt_tools

load_dotenv()

settings = Settings.from_env()
mcp = FastMCP("promptlib")
repository = PromptRepository(settings.prompts_file)
register_prompt_tools(mcp, repository, settings.categories_file)


def main():
    create_directories(settings.directories())
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
