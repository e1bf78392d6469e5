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

"""
Unit tests for message rendering and wrapper installation.
"""
import io

import pytest

from copy_headers import copy_headers
from header_text import BadFormat
from message_view import MessageViewer
from reorder_headers import (
    install_header_order,
    render_headers,
    uninstall_header_order,
)


def shout(orig, conf, text, beg, end, view, ignored_headers=None):
    sub = io.StringIO()
    orig(conf, text, beg, end, sub, ignored_headers)
    view.write(sub.getvalue().upper())


@pytest.fixture
def viewer(conf):
    conf.set_header_order(["Subject", "From"])
    return MessageViewer(conf)


class TestAdvice:

    def test_starts_with_plain_routine(self, viewer, simple_message):
        assert viewer.copy_headers is copy_headers
        assert viewer.headers(simple_message) == "Subject: hi\nTo: b@x\n"

    def test_install_reorders(self, viewer, simple_message):
        install_header_order(viewer)
        assert viewer.has_advice(render_headers)
        assert viewer.headers(simple_message) == "Subject: hi\nFrom: a@x\n"

    def test_uninstall_restores(self, viewer, simple_message):
        install_header_order(viewer)
        uninstall_header_order(viewer)
        assert viewer.copy_headers is copy_headers
        assert not viewer.has_advice(render_headers)
        assert viewer.headers(simple_message) == "Subject: hi\nTo: b@x\n"

    def test_install_twice_is_noop(self, viewer):
        install_header_order(viewer)
        install_header_order(viewer)
        uninstall_header_order(viewer)
        assert viewer.copy_headers is copy_headers

    def test_uninstall_without_install(self, viewer):
        uninstall_header_order(viewer)
        assert viewer.copy_headers is copy_headers

    def test_stacked_advice(self, viewer, simple_message):
        install_header_order(viewer)
        viewer.add_advice(shout)
        assert viewer.headers(simple_message) == "SUBJECT: HI\nFROM: A@X\n"
        uninstall_header_order(viewer)
        assert viewer.headers(simple_message) == "SUBJECT: HI\nTO: B@X\n"

    def test_configuration_read_per_call(self, viewer, simple_message):
        install_header_order(viewer)
        viewer.conf.set_header_order(["To"])
        assert viewer.headers(simple_message) == "To: b@x\n"
        viewer.conf.set_header_order([])
        assert viewer.headers(simple_message) == "Subject: hi\nTo: b@x\n"


class TestShow:

    def test_headers_blank_line_and_body(self, viewer, simple_message):
        install_header_order(viewer)
        view = viewer.show(simple_message)
        assert view.getvalue() == "Subject: hi\nFrom: a@x\n\nbody\n"

    def test_writes_to_given_view(self, viewer, simple_message):
        install_header_order(viewer)
        view = io.StringIO()
        view.write(">>")
        assert viewer.show(simple_message, view=view) is view
        assert view.getvalue() == ">>Subject: hi\nFrom: a@x\n\nbody\n"

    def test_message_bounds(self, viewer, simple_message, mbox_message):
        install_header_order(viewer)
        text = simple_message + mbox_message
        first = viewer.show(text, 0, len(simple_message)).getvalue()
        assert first == "Subject: hi\nFrom: a@x\n\nbody\n"
        second = viewer.show(text, len(simple_message)).getvalue()
        assert second == (
            "Subject: Greetings\n"
            "From: Alice <alice@example.com>\n"
            "\n"
            "Hello Bob.\n"
        )

    def test_bad_format(self, viewer):
        install_header_order(viewer)
        with pytest.raises(BadFormat):
            viewer.show("Subject: hi\nFrom: a@x\n")
