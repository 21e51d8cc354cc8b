import threading
import unittest

from eigembed import EigEmbed, EigenMethod, InvalidArgument, UnsupportedMethod
from utils import backends

class TestOptions(unittest.TestCase):

    def setUp(self):
        self.eigembed = [EigEmbed(backend) for backend in backends]

    def test_options(self) -> None:

        opts = [lambda ee: ee.options(),
                lambda ee: ee.options(method="randomized", rank_tol=1e-6),
                lambda ee: ee.options(method=EigenMethod.ITERATIVE, tol=1e-8, ncv=20)]

        for ee in self.eigembed:

            for ofunc in opts:
                with ofunc(ee) as opts1:
                    with ofunc(ee) as opts2:
                        self.assertEqual(opts2, ee.get_options())
                    self.assertEqual(opts1, ee.get_options())

                opt = ofunc(ee)
                ee.set_options(opt)
                self.assertEqual(opt, ee.get_options())

    def test_thread_local(self) -> None:
        for ee in self.eigembed:
            found = []
            def worker():
                try:
                    ee.get_options()
                    found.append(True)
                except KeyError:
                    found.append(False)
            with ee.options(method="randomized"):
                thread = threading.Thread(target=worker)
                thread.start()
                thread.join()
            self.assertEqual(found, [False])

    def test_invalid(self) -> None:
        for ee in self.eigembed:
            self.assertRaises(InvalidArgument, ee.options, rank_tol=-1.0)
            self.assertRaises(InvalidArgument, ee.options, tol=-1.0)
            self.assertRaises(InvalidArgument, ee.options, max_iter=0)
            self.assertRaises(UnsupportedMethod, ee.options, method="qr")

if __name__ == "__main__":
    unittest.main()
