"""Network models: per interface link stats and the protocol counters.

The ``network`` and ``transport`` dump domains share :class:`NetworkField`;
each exposes only the groups for its own protocol layer.
"""

from __future__ import annotations

from dumpctl.domain.fields import FieldId


class IfaceField(FieldId):
    INTERFACE = "interface"
    RX_BYTES_PER_SEC = "rx_bytes_per_sec"
    TX_BYTES_PER_SEC = "tx_bytes_per_sec"
    THROUGHPUT_PER_SEC = "throughput_per_sec"
    RX_PACKETS_PER_SEC = "rx_packets_per_sec"
    TX_PACKETS_PER_SEC = "tx_packets_per_sec"
    COLLISIONS = "collisions"
    MULTICAST = "multicast"
    RX_BYTES = "rx_bytes"
    RX_COMPRESSED = "rx_compressed"
    RX_CRC_ERRORS = "rx_crc_errors"
    RX_DROPPED = "rx_dropped"
    RX_ERRORS = "rx_errors"
    RX_FIFO_ERRORS = "rx_fifo_errors"
    RX_FRAME_ERRORS = "rx_frame_errors"
    RX_LENGTH_ERRORS = "rx_length_errors"
    RX_MISSED_ERRORS = "rx_missed_errors"
    RX_NOHANDLER = "rx_nohandler"
    RX_OVER_ERRORS = "rx_over_errors"
    RX_PACKETS = "rx_packets"
    TX_ABORTED_ERRORS = "tx_aborted_errors"
    TX_BYTES = "tx_bytes"
    TX_CARRIER_ERRORS = "tx_carrier_errors"
    TX_COMPRESSED = "tx_compressed"
    TX_DROPPED = "tx_dropped"
    TX_ERRORS = "tx_errors"
    TX_FIFO_ERRORS = "tx_fifo_errors"
    TX_HEARTBEAT_ERRORS = "tx_heartbeat_errors"
    TX_PACKETS = "tx_packets"
    TX_WINDOW_ERRORS = "tx_window_errors"


class NetworkField(FieldId):
    IP_FORWARDING_PKTS_PER_SEC = "ip.forwarding_pkts_per_sec"
    IP_IN_RECEIVES_PKTS_PER_SEC = "ip.in_receives_pkts_per_sec"
    IP_FORW_DATAGRAMS_PER_SEC = "ip.forw_datagrams_per_sec"
    IP_IN_DISCARDS_PKTS_PER_SEC = "ip.in_discards_pkts_per_sec"
    IP_IN_DELIVERS_PKTS_PER_SEC = "ip.in_delivers_pkts_per_sec"
    IP_OUT_REQUESTS_PER_SEC = "ip.out_requests_per_sec"
    IP_OUT_DISCARDS_PKTS_PER_SEC = "ip.out_discards_pkts_per_sec"
    IP_OUT_NO_ROUTES_PKTS_PER_SEC = "ip.out_no_routes_pkts_per_sec"
    IP_IN_MCAST_PKTS_PER_SEC = "ip.in_mcast_pkts_per_sec"
    IP_OUT_MCAST_PKTS_PER_SEC = "ip.out_mcast_pkts_per_sec"
    IP_IN_BCAST_PKTS_PER_SEC = "ip.in_bcast_pkts_per_sec"
    IP_OUT_BCAST_PKTS_PER_SEC = "ip.out_bcast_pkts_per_sec"
    IP_IN_OCTETS_PER_SEC = "ip.in_octets_per_sec"
    IP_OUT_OCTETS_PER_SEC = "ip.out_octets_per_sec"
    IP_IN_MCAST_OCTETS_PER_SEC = "ip.in_mcast_octets_per_sec"
    IP_OUT_MCAST_OCTETS_PER_SEC = "ip.out_mcast_octets_per_sec"
    IP_IN_BCAST_OCTETS_PER_SEC = "ip.in_bcast_octets_per_sec"
    IP_OUT_BCAST_OCTETS_PER_SEC = "ip.out_bcast_octets_per_sec"
    IP_IN_NO_ECT_PKTS_PER_SEC = "ip.in_no_ect_pkts_per_sec"

    IP6_IN_RECEIVES_PKTS_PER_SEC = "ip6.in_receives_pkts_per_sec"
    IP6_IN_HDR_ERRORS = "ip6.in_hdr_errors"
    IP6_IN_NO_ROUTES_PKTS_PER_SEC = "ip6.in_no_routes_pkts_per_sec"
    IP6_IN_ADDR_ERRORS = "ip6.in_addr_errors"
    IP6_IN_DISCARDS_PKTS_PER_SEC = "ip6.in_discards_pkts_per_sec"
    IP6_IN_DELIVERS_PKTS_PER_SEC = "ip6.in_delivers_pkts_per_sec"
    IP6_OUT_FORW_DATAGRAMS_PER_SEC = "ip6.out_forw_datagrams_per_sec"
    IP6_OUT_REQUESTS_PER_SEC = "ip6.out_requests_per_sec"
    IP6_OUT_NO_ROUTES_PKTS_PER_SEC = "ip6.out_no_routes_pkts_per_sec"
    IP6_IN_MCAST_PKTS_PER_SEC = "ip6.in_mcast_pkts_per_sec"
    IP6_OUT_MCAST_PKTS_PER_SEC = "ip6.out_mcast_pkts_per_sec"
    IP6_IN_OCTETS_PER_SEC = "ip6.in_octets_per_sec"
    IP6_OUT_OCTETS_PER_SEC = "ip6.out_octets_per_sec"
    IP6_IN_MCAST_OCTETS_PER_SEC = "ip6.in_mcast_octets_per_sec"
    IP6_OUT_MCAST_OCTETS_PER_SEC = "ip6.out_mcast_octets_per_sec"
    IP6_IN_BCAST_OCTETS_PER_SEC = "ip6.in_bcast_octets_per_sec"
    IP6_OUT_BCAST_OCTETS_PER_SEC = "ip6.out_bcast_octets_per_sec"

    ICMP_IN_MSGS_PER_SEC = "icmp.in_msgs_per_sec"
    ICMP_IN_ERRORS = "icmp.in_errors"
    ICMP_IN_DEST_UNREACHS = "icmp.in_dest_unreachs"
    ICMP_OUT_MSGS_PER_SEC = "icmp.out_msgs_per_sec"
    ICMP_OUT_ERRORS = "icmp.out_errors"
    ICMP_OUT_DEST_UNREACHS = "icmp.out_dest_unreachs"

    ICMP6_IN_MSGS_PER_SEC = "icmp6.in_msgs_per_sec"
    ICMP6_IN_ERRORS = "icmp6.in_errors"
    ICMP6_IN_DEST_UNREACHS = "icmp6.in_dest_unreachs"
    ICMP6_OUT_MSGS_PER_SEC = "icmp6.out_msgs_per_sec"
    ICMP6_OUT_ERRORS = "icmp6.out_errors"
    ICMP6_OUT_DEST_UNREACHS = "icmp6.out_dest_unreachs"

    TCP_ACTIVE_OPENS_PER_SEC = "tcp.active_opens_per_sec"
    TCP_PASSIVE_OPENS_PER_SEC = "tcp.passive_opens_per_sec"
    TCP_ATTEMPT_FAILS_PER_SEC = "tcp.attempt_fails_per_sec"
    TCP_ESTAB_RESETS_PER_SEC = "tcp.estab_resets_per_sec"
    TCP_CURR_ESTAB_CONN = "tcp.curr_estab_conn"
    TCP_IN_SEGS_PER_SEC = "tcp.in_segs_per_sec"
    TCP_OUT_SEGS_PER_SEC = "tcp.out_segs_per_sec"
    TCP_RETRANS_SEGS_PER_SEC = "tcp.retrans_segs_per_sec"
    TCP_RETRANS_SEGS = "tcp.retrans_segs"
    TCP_IN_ERRS = "tcp.in_errs"
    TCP_OUT_RSTS_PER_SEC = "tcp.out_rsts_per_sec"
    TCP_IN_CSUM_ERRORS = "tcp.in_csum_errors"

    UDP_IN_DATAGRAMS_PKTS_PER_SEC = "udp.in_datagrams_pkts_per_sec"
    UDP_NO_PORTS = "udp.no_ports"
    UDP_IN_ERRORS = "udp.in_errors"
    UDP_OUT_DATAGRAMS_PKTS_PER_SEC = "udp.out_datagrams_pkts_per_sec"
    UDP_RCVBUF_ERRORS = "udp.rcvbuf_errors"
    UDP_SNDBUF_ERRORS = "udp.sndbuf_errors"
    UDP_IGNORED_MULTI = "udp.ignored_multi"

    UDP6_IN_DATAGRAMS_PKTS_PER_SEC = "udp6.in_datagrams_pkts_per_sec"
    UDP6_NO_PORTS = "udp6.no_ports"
    UDP6_IN_ERRORS = "udp6.in_errors"
    UDP6_OUT_DATAGRAMS_PKTS_PER_SEC = "udp6.out_datagrams_pkts_per_sec"
    UDP6_RCVBUF_ERRORS = "udp6.rcvbuf_errors"
    UDP6_SNDBUF_ERRORS = "udp6.sndbuf_errors"
    UDP6_IN_CSUM_ERRORS = "udp6.in_csum_errors"
    UDP6_IGNORED_MULTI = "udp6.ignored_multi"
