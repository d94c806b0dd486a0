"""
HTTP Server Entry Point
Serves the API and the static pages under public/
"""
import logging
import uvicorn
from mindful_campus import config

logging.basicConfig(level=logging.INFO)

if __name__ == "__main__":
    uvicorn.run("mindful_campus.main:app", host=config.HOST, port=config.PORT)
