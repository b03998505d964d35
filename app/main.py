from dotenv import load_dotenv

from server import server

# Exposes AWS credentials from .env to boto3, which reads os.environ directly
load_dotenv()

# ASGI entry point, e.g. `uvicorn main:server_app`
server_app = server.handler
