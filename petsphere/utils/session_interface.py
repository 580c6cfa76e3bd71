import logging
import secrets

from flask.sessions import SessionInterface, SessionMixin
from itsdangerous import BadSignature, Signer
from werkzeug.datastructures import CallbackDict

logger = logging.getLogger(__name__)


class ServerSideSession(CallbackDict, SessionMixin):
    """Session dict whose contents live in a ``SessionStore``; only the
    signed session id travels in the cookie."""

    def __init__(self, initial=None, sid=None, new=False):
        def on_update(self):
            self.modified = True

        CallbackDict.__init__(self, initial, on_update)
        self.sid = sid
        self.new = new
        self.modified = False
        self.previous_sid = None

    def regenerate(self):
        """Move the session to a fresh id (called on login)."""
        if self.previous_sid is None and not self.new:
            self.previous_sid = self.sid
        self.sid = _new_sid()
        self.modified = True


def _new_sid():
    return secrets.token_urlsafe(32)


class MemorySessionInterface(SessionInterface):
    """Flask session interface backed by an in-memory ``SessionStore``.

    Every response for a non-empty session renews its expiry, so a session
    lives for ``PERMANENT_SESSION_LIFETIME`` after the last request that used
    it. Empty sessions are never stored and no cookie is sent for them.
    """

    salt = 'petsphere-session'

    def __init__(self, store):
        self.store = store

    def _signer(self, app):
        return Signer(app.secret_key, salt=self.salt)

    def open_session(self, app, request):
        if not app.secret_key:
            return None
        cookie = request.cookies.get(self.get_cookie_name(app))
        if not cookie:
            return ServerSideSession(sid=_new_sid(), new=True)
        try:
            sid = self._signer(app).unsign(cookie).decode('utf-8')
        except BadSignature:
            logger.warning("Rejected session cookie with a bad signature")
            return ServerSideSession(sid=_new_sid(), new=True)
        data = self.store.get(sid)
        if data is None:
            return ServerSideSession(sid=_new_sid(), new=True)
        return ServerSideSession(data, sid=sid)

    def save_session(self, app, session, response):
        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)

        if session.previous_sid is not None:
            self.store.destroy(session.previous_sid)

        if not session:
            if session.modified and not session.new:
                self.store.destroy(session.sid)
                response.delete_cookie(name, domain=domain, path=path)
            return

        max_age = app.permanent_session_lifetime.total_seconds()
        # Unchanged data only needs its expiry pushed back
        if session.modified or session.new or not self.store.touch(session.sid, max_age):
            self.store.set(session.sid, dict(session), max_age)
        response.set_cookie(
            name,
            self._signer(app).sign(session.sid).decode('utf-8'),
            max_age=int(max_age),
            httponly=self.get_cookie_httponly(app),
            domain=domain,
            path=path,
            secure=self.get_cookie_secure(app),
            samesite=self.get_cookie_samesite(app),
        )
        response.vary.add('Cookie')
