import asyncio
import uvicorn

# (app import path, port)
SERVICES = [
    ("auth_service.app.main:app", 8001),
    ("inventory_service.app.main:app", 8002),
]


def build_server(app_path: str, port: int) -> uvicorn.Server:
    config = uvicorn.Config(
        app_path,
        host="0.0.0.0",
        port=port,
        reload=True,
    )
    return uvicorn.Server(config)


async def start_servers():
    servers = [build_server(app_path, port) for app_path, port in SERVICES]

    # Run all servers concurrently
    await asyncio.gather(*(server.serve() for server in servers))

if __name__ == "__main__":
    try:
        asyncio.run(start_servers())
    except KeyboardInterrupt:
        print("\nShutting down servers...")
