from flask import Blueprint

from api.routes_forms import register_form_routes
from sheets.sheets_utils import SheetsClient, load_credentials


api = Blueprint("api", __name__)

# Credentials are parsed once at startup; a bad or missing blob leaves them
# unset and the error is reported on the first submission instead.
sheets_client = SheetsClient(load_credentials())


register_form_routes(api, sheets_client)
