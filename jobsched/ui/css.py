"""All CSS strings for the job schedule UI."""


APP_CSS = """
Screen {
    background: #000000;
}
"""


JOB_NUMBER_CSS = """
JobNumberScreen {
    align: center middle;
}

#job-number-panel {
    width: 60%;
    max-width: 60;
    height: auto;
    border: solid #00d7d7;
    background: #0a0a0a;
    padding: 1 2;
}

#job-number-heading {
    width: 100%;
    content-align: center middle;
    color: #00d7d7;
    text-style: bold;
}

#job-number-input {
    width: 100%;
    margin: 1 0;
}

#job-number-enter {
    width: 100%;
}

#job-number-error {
    width: 100%;
    margin: 1 0 0 0;
    color: #ff3366;
}
"""


SCHEDULE_CSS = """
ScheduleScreen {
    align: center middle;
}

#schedule-panel {
    width: 80%;
    height: auto;
    border: solid #00d7d7;
    background: #0a0a0a;
    padding: 1 2;
}

#schedule-job {
    width: 100%;
    content-align: center middle;
    color: #00d7d7;
    text-style: bold;
    margin: 0 0 2 0;
}

#schedule-body {
    width: 100%;
    content-align: center middle;
    color: #cccccc;
}

#schedule-hint {
    width: 100%;
    content-align: center middle;
    color: #3a5a5a;
    margin: 2 0 0 0;
}
"""
