import redis
from redis.exceptions import RedisError
from tenacity import retry, stop_after_attempt, wait_fixed, retry_if_exception_type

from ecorevive.utils.settings import REDIS_URL
from ecorevive.utils.logging import get_logger

logger = get_logger(__name__)


def lock_retry():
    # checkout czeka na odpowiedz, wiec krotko: 2 proby
    return retry(
        reraise=True,
        stop=stop_after_attempt(2),
        wait=wait_fixed(0.1),
        retry=retry_if_exception_type(RedisError),
    )


#LUA porownaj i usun, atomicity
_RELEASE_LUA = """
if redis.call('GET', KEYS[1]) == ARGV[1] then
    return redis.call('DEL', KEYS[1])
else
    return 0
end
"""

#lua jest wykonywane atomowo, nikt nie wcisnie sie miedzy GET a DEL
#wiec zwalnia tylko ten kto trzyma locka (ten sam token)


class LockService:
    """
    -blokada checkoutu per uzytkownik (odczyt koszyka, zapis zamowienia, czyszczenie)
    -zwalnianie locka tylko przez wlasciciela tokenu
    """

    def __init__(self, url: str | None = None, client: redis.Redis | None = None):
        self.redis = client or redis.Redis.from_url(
            url or REDIS_URL,
            decode_responses=True,
        )

    @staticmethod
    def checkout_key(user_id: int) -> str:
        return f"checkout:{user_id}:lock"

    @lock_retry()
    def acquire_checkout_lock(self, user_id: int, token: str, ttl: int) -> bool:
        key = self.checkout_key(user_id)
        logger.info(f"Acquire lock {key}")
        #SET checkout:1:lock "<token>" NX EX 30
        return bool(
            self.redis.set(
                name=key,
                value=token,
                nx=True,  #tylko jesli klucz nie istnieje
                ex=ttl,  #wygasa sam, gdyby proces padl w trakcie checkoutu
            )
        )

    @lock_retry()
    def release_checkout_lock(self, user_id: int, token: str) -> bool:
        key = self.checkout_key(user_id)
        logger.info(f"Release lock {key}")
        res = self.redis.eval(_RELEASE_LUA, 1, key, token)
        return bool(res)
