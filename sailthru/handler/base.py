# -*- coding: utf-8 -*-
# sailthru/handler/base.py
# Plain base class with NotImplementedError, same shape as the other interfaces.


class SailthruResponseHandler(object):
    def get_format(self):
        """Return the value sent in the ``format`` field, e.g. 'json'"""
        raise NotImplementedError

    def get_response(self, body):
        """Parse the raw response text into dict / list / scalar / None.
           Must raise ResponseParseError on a malformed body, never return a partial value.
        """
        raise NotImplementedError
