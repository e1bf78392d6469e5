## Copyright (c) 2026, Lancaster University
## All rights reserved.
##
## Redistribution and use in source and binary forms, with or without
## modification, are permitted provided that the following conditions
## are met:
##
## 1. Redistributions of source code must retain the above copyright
##    notice, this list of conditions and the following disclaimer.
##
## 2. Redistributions in binary form must reproduce the above
##    copyright notice, this list of conditions and the following
##    disclaimer in the documentation and/or other materials provided
##    with the distribution.
##
## 3. Neither the name of the copyright holder nor the names of its
##    contributors may be used to endorse or promote products derived
##    from this software without specific prior written permission.
##
## THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS
## "AS IS" AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT
## LIMITED TO, THE IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS
## FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO EVENT SHALL THE
## COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT,
## INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES
## (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
## SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION)
## HOWEVER CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT,
## STRICT LIABILITY, OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE)
## ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE, EVEN IF ADVISED
## OF THE POSSIBILITY OF SUCH DAMAGE.

import io
import functools

from copy_headers import copy_headers
from header_text import find_header_limit

class MessageViewer:
    """Render messages for display.

    Header fields are copied by 'copy_headers', which starts out as the
    plain routine.  Wrappers added with 'add_advice' are called as
    'advice(orig, conf, text, beg, end, view, ignored_headers)', where
    'orig' is whatever routine was in place beneath them.  Removing a
    wrapper rebuilds the chain without it.
    """

    def __init__(self, conf, base=copy_headers):
        self.conf = conf
        self._base = base
        self._advice = [ ]
        self.copy_headers = base
        pass

    def _rebuild(self):
        fn = self._base
        for advice in self._advice:
            fn = functools.partial(advice, fn)
            continue
        self.copy_headers = fn
        pass

    def has_advice(self, advice):
        return advice in self._advice

    def add_advice(self, advice):
        if advice not in self._advice:
            self._advice.append(advice)
            self._rebuild()
            pass
        return advice

    def remove_advice(self, advice):
        if advice in self._advice:
            self._advice.remove(advice)
            self._rebuild()
            pass
        pass

    def headers(self, text, beg=0, end=None, ignored_headers=None):
        if end is None:
            end = len(text)
            pass
        view = io.StringIO()
        self.copy_headers(self.conf, text, beg, end, view, ignored_headers)
        return view.getvalue()

    def show(self, text, beg=0, end=None, view=None, ignored_headers=None):
        """Write the headers, a blank line and the body of the message
        between 'beg' and 'end' to 'view', and return it."""
        if end is None:
            end = len(text)
            pass
        if view is None:
            view = io.StringIO()
            pass
        self.copy_headers(self.conf, text, beg, end, view, ignored_headers)
        lim = find_header_limit(text, beg)
        view.write('\n')
        view.write(text[lim + 1:end])
        return view

    pass
