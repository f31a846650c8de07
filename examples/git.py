""" A promise type cloning a git repository. The promiser is the target
    directory; the 'repo' attribute is the (local) repository to clone.
"""

import os
import subprocess

import cfpromise
from cfpromise import ApplyResult, AttributeType, CheckResult


class Git(cfpromise.PromiseType):

    name = 'git_promise_module'
    version = '0.0.1'

    def required_attributes(self):
        return [('repo', AttributeType.AbsolutePath)]


    def check(self, promiser, attributes, log):

        if os.path.exists(promiser):
            return CheckResult.kept()
        else:
            return CheckResult.not_kept('repo %s does not exist' % (promiser))


    def apply(self, promiser, attributes, log):

        # The attributes have already been checked against the schema.
        url = attributes['repo']

        if os.path.exists(promiser):
            return ApplyResult.kept()

        log.info("Cloning '%s' -> '%s'..." % (url, promiser))

        arguments = ['git', 'clone', url, promiser]

        try:
            completed = subprocess.run(arguments, capture_output=True, text=True)
        except OSError as e:
            return ApplyResult.not_kept(str(e))

        if completed.returncode != 0:
            return ApplyResult.not_kept('git clone failed: ' + completed.stderr.strip())

        if os.path.exists(promiser):
            return ApplyResult.repaired("Successfully cloned '%s' -> '%s'" % (url, promiser))
        else:
            return ApplyResult.not_kept('git ran successfully but repo was not created')


# end of class Git



if __name__ == '__main__':
    cfpromise.Executor().run(Git())


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
