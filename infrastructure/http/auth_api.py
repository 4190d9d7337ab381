"""
HTTP surface of the authentication service.

POST /api/login      {email, senha}                                   -> 200 | 401 | 500
POST /api/registrar  {nome, email, senha, cpf?, endereco?, telefone?} -> 201 | 400 | 500
Any other method on these paths -> 405 (plain text).
"""

import logging
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.requests import Request

import auth

log = logging.getLogger(__name__)

APP_TITLE = "Community Connect Auth API"
LOGIN_PATH = "/api/login"
REGISTER_PATH = "/api/registrar"
OTHER_METHODS = ["GET", "PUT", "DELETE", "PATCH"]

app = FastAPI(title=APP_TITLE)


async def _json_object(request: Request) -> Dict[str, Any]:
    body = await request.body()
    if not body:
        return {}
    data = await request.json()
    if not isinstance(data, dict):
        raise ValueError("JSON body must be an object")
    return data


@app.post(LOGIN_PATH, response_class=JSONResponse)
async def login(request: Request):
    try:
        data = await _json_object(request)
        usuario = auth.authenticate_user(data.get("email"), data.get("senha"))
    except auth.InvalidCredentialsError as e:
        log.info(f"POST {LOGIN_PATH} -> 401")
        return JSONResponse({"sucesso": False, "mensagem": str(e)}, status_code=401)
    except Exception as e:
        log.error(f"Erro no login: {e}", exc_info=True)
        return JSONResponse({"sucesso": False, "mensagem": "Erro interno"}, status_code=500)
    log.info(f"POST {LOGIN_PATH} -> 200")
    return JSONResponse({"sucesso": True, "usuario": usuario}, status_code=200)


@app.post(REGISTER_PATH, response_class=JSONResponse)
async def register(request: Request):
    try:
        data = await _json_object(request)
        usuario = auth.register_user(
            data.get("nome"),
            data.get("email"),
            data.get("senha"),
            cpf=data.get("cpf"),
            endereco=data.get("endereco"),
            telefone=data.get("telefone"),
        )
    except (auth.RegistrationValidationError, auth.UserAlreadyExistsError) as e:
        log.info(f"POST {REGISTER_PATH} -> 400")
        return JSONResponse({"sucesso": False, "mensagem": str(e)}, status_code=400)
    except Exception as e:
        log.error(f"Erro no cadastro: {e}", exc_info=True)
        return JSONResponse(
            {"sucesso": False, "mensagem": "Erro ao criar conta. Tente novamente."}, status_code=500
        )
    log.info(f"POST {REGISTER_PATH} -> 201")
    return JSONResponse(
        {"sucesso": True, "mensagem": "Conta criada com sucesso!", "usuario": usuario}, status_code=201
    )


@app.api_route(LOGIN_PATH, methods=OTHER_METHODS)
@app.api_route(REGISTER_PATH, methods=OTHER_METHODS)
async def method_not_allowed(request: Request):
    log.info(f"{request.method} {request.url.path} -> 405")
    return PlainTextResponse("Method not allowed", status_code=405)
