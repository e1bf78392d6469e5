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

import yaml
import os

DEFAULT_ORDER = [ 'Date', 'From', 'To', 'Reply-To', 'Cc', 'Bcc',
                  'Thread-Topic', 'Subject' ]

## Fields hidden by the normal display style.  Matched case-insensitively
## at the start of each header line.
DEFAULT_IGNORED = '|'.join([ '^' + n + ':' for n in [
    'via', 'mail-from', 'origin', 'references', 'sender', 'status',
    'received', r'(resent-)?message-id', 'summary-line', 'resent-date',
    'nntp-posting-host', 'path', 'x-char.*', 'x-face', 'face',
    'x-mailer', 'delivered-to', 'lines', 'content-transfer-encoding',
    'x-coding-system', 'return-path', 'errors-to', 'return-receipt-to',
    'precedence', 'mime-version', 'list-owner', 'list-help',
    'list-post', 'list-subscribe', 'list-id', 'list-unsubscribe',
    'list-archive', 'content-length', 'nntp-posting-date', 'user-agent',
    'importance', 'envelope-to', 'delivery-date', 'openpgp',
    'mbox-line', 'cancel-lock', 'domainkey-signature', 'dkim-signature',
    'arc-.*', 'received-spf', 'authentication-results', 'resent-face',
    'resent-x.*', 'resent-organization', 'resent-openpgp', 'x-.*' ] ])

DEFAULT_NONIGNORED = '^x-spam-status:'

HEADER_STYLES = [ 'normal', 'full' ]

def _name_list(val):
    if val is None:
        return [ ]
    if isinstance(val, str):
        val = val.split(',')
        pass
    return [ str(n).strip() for n in val if str(n).strip() != '' ]

def _opt_copy(dst, dst_attr, src, src_key, xform=None):
    if src_key not in src:
        return getattr(dst, dst_attr)
    val = src[src_key]
    if xform is not None and val is not None:
        val = xform(val)
        pass
    setattr(dst, dst_attr, val)
    return val

class HeaderOrderConfiguration:
    CONFIG_ENV = 'HDRORDER_CONFIG'
    DEFAULT_CONFIG = '~/.config/hdrorder/config.yml'

    def __init__(self, _cfg_filename=None):
        self.header_order = list(DEFAULT_ORDER)
        self.header_style = 'normal'
        self.ignored_headers = DEFAULT_IGNORED
        self.nonignored_headers = DEFAULT_NONIGNORED
        self.displayed_headers = None

        ## Only the default location may be absent.
        required = True
        if _cfg_filename is not None:
            self._cfg_filename = _cfg_filename
            pass
        else:
            self._cfg_filename = os.environ.get(self.CONFIG_ENV, None)
            if self._cfg_filename is None:
                self._cfg_filename = self.DEFAULT_CONFIG
                required = False
                pass
            pass

        path = os.path.expanduser(self._cfg_filename)
        if not required and not os.path.exists(path):
            return

        ## Load the configuration.
        with open(path, "r") as stream:
            config = yaml.safe_load(stream)
            pass
        if config is None:
            config = { }
            pass

        _opt_copy(self, 'header_order', config, 'header-order',
                  xform=_name_list)
        if self.header_order is None:
            self.header_order = [ ]
            pass
        _opt_copy(self, 'header_style', config, 'header-style')
        if self.header_style not in HEADER_STYLES:
            raise ValueError('%s: header-style must be one of %s, not %r'
                             % (path, ', '.join(HEADER_STYLES),
                                self.header_style))
        _opt_copy(self, 'ignored_headers', config, 'ignored-headers')
        _opt_copy(self, 'nonignored_headers', config, 'nonignored-headers')
        _opt_copy(self, 'displayed_headers', config, 'displayed-headers')
        pass

    @property
    def enabled(self):
        return len(self.header_order) > 0

    def set_header_order(self, names):
        """Replace the header order.  An empty sequence turns
        reordering off."""
        self.header_order = list(names)
        pass

    pass
