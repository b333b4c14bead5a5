from oci_reference.cli import main

main()
