from dotenv import load_dotenv
load_dotenv()  # Load .env before settings and logging read the environment

from sitecraft.api import create_app

app = create_app()
