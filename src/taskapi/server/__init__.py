from taskapi.server.server import TaskServer


__all__ = ['TaskServer']
