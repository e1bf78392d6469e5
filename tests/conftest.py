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
Shared fixtures for the header display tests.
"""
import pytest

from reorder_config import HeaderOrderConfiguration


SIMPLE = "From: a@x\nSubject: hi\nTo: b@x\n\nbody\n"

MBOX = (
    "From alice@example.com Mon Jan  1 00:00:00 2024\n"
    "Received: from mx.example.com\n"
    "\tby mail.example.com\n"
    "From: Alice <alice@example.com>\n"
    "To: bob@example.com\n"
    "Subject: Greetings\n"
    "Date: Mon, 1 Jan 2024 00:00:00 +0000\n"
    "X-Long: part1\n"
    " part2\n"
    "\n"
    "Hello Bob.\n"
)


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """A home directory with no configuration file in it."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("HDRORDER_CONFIG", raising=False)
    return tmp_path


@pytest.fixture
def conf(isolated_home):
    return HeaderOrderConfiguration()


@pytest.fixture
def simple_message():
    return SIMPLE


@pytest.fixture
def mbox_message():
    return MBOX
