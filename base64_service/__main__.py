from base64_service.main import run

run()
