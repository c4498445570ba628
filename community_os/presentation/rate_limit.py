from slowapi import Limiter
from slowapi.util import get_remote_address

# Shared so app.state.limiter and the route decorators agree
limiter = Limiter(key_func=get_remote_address)
